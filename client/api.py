import os, requests
from dotenv import load_dotenv
load_dotenv()
API = os.getenv("API_BASE_URL", "http://localhost:8000")
# JWST feed and astro events come from the upstream proxy; same host unless told otherwise
FEEDS = os.getenv("FEEDS_BASE_URL", API)
TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "20"))
S = requests.Session(); S.headers.update({"Accept":"application/json"})

def _get(base, path, **params):
    r = S.get(f"{base}{path}", params=params or None, timeout=TIMEOUT)
    r.raise_for_status()
    return r.json()

def healthz():            return _get(API, "/healthz")
def telemetry(**p):       return _get(API, "/api/telemetry", **p)
def iss_last():           return _get(API, "/api/iss/last")
def iss_history(**p):     return _get(API, "/api/iss/history", **p)
def iss_trend(limit=240): return _get(API, "/api/iss/trend", limit=int(limit))
def cms_block(slug: str): return _get(API, f"/api/cms/{slug}")

def jwst_feed(**p):
    """p: source, suffix, program, instrument, perPage; empty values are dropped."""
    return _get(FEEDS, "/api/jwst/feed", **{k: v for k, v in p.items() if v not in (None, "")})

def astro_events(lat, lon, days):
    return _get(FEEDS, "/api/astro/events", lat=lat, lon=lon, days=int(days))
