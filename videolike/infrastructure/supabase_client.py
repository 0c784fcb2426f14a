import os
from functools import lru_cache
from supabase import create_client, Client

from videolike.config import SUPABASE_URL, SUPABASE_ANON_KEY

@lru_cache(maxsize=1)
def get_supabase() -> Client:
    """
    Builds the shared Supabase client on first use so the in-memory
    store can run without any Supabase credentials.
    """
    if not SUPABASE_URL or not SUPABASE_ANON_KEY:
        raise ValueError(f"Supabase credentials not found in environment. Checked SUPABASE_URL and NEXT_PUBLIC_SUPABASE_URL. CWD: {os.getcwd()}")

    return create_client(SUPABASE_URL, SUPABASE_ANON_KEY)
