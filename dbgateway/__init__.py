"""Table gateway: generic REST data access over Supabase."""
