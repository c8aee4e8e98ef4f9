import requests
import json
import os
import sys
import time
import random
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

# --- CONFIGURATION ---
# Registrar export service, e.g. https://registrar.university.edu/api/export.
# Required: there is no default host.
EXPORT_URL = os.environ.get("REGISTRAR_EXPORT_URL", "").rstrip("/")

TERMS = ["Fall 2025", "Spring 2026"]

# Programs whose degree requirement documents we mirror: (subject, degree type)
PROGRAMS = [
    ("CSE", "BS"),
    ("CSE", "MIN"),
    ("AMS", "BS"),
    ("ISE", "BS"),
]

# Calculate paths relative to this script file
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DATA_DIR = os.path.join(BASE_DIR, "data")
SCHEDULES_DIR = os.path.join(DATA_DIR, "registration_schedules")
REQUIREMENTS_DIR = os.path.join(DATA_DIR, "degree_requirements")
# ---------------------


# --- SESSION SETUP ---
def create_retry_session():
    session = requests.Session()
    retries = Retry(
        total=5,
        backoff_factor=2,  # Wait 2s, 4s, 8s, 16s... on 429 errors
        status_forcelist=[429, 500, 502, 503, 504],
        allowed_methods=["GET"]
    )
    adapter = HTTPAdapter(max_retries=retries)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    session.headers.update({"Accept": "application/json"})
    return session


def term_slug(term):
    # Same filename scheme as registrar.data.loader.term_slug
    return "_".join(term.strip().lower().split())


def fetch_json(session, url):
    """GET a JSON document. Returns None on 404 or any request failure."""
    try:
        resp = session.get(url, timeout=15)
    except requests.RequestException as e:
        print(f"[Err: {e}]", end=" ")
        return None

    if resp.status_code == 200:
        return resp.json()
    if resp.status_code == 404:
        print("[∅ 404]", end=" ", flush=True)
    else:
        print(f"[⚠️ {resp.status_code}]", end=" ", flush=True)
    return None


def save_json(data, filename):
    with open(filename, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=4)


def run():
    os.makedirs(SCHEDULES_DIR, exist_ok=True)
    os.makedirs(REQUIREMENTS_DIR, exist_ok=True)

    session = create_retry_session()
    print(f"🔗 Base URL: {EXPORT_URL}")
    failures = 0

    # 1. Registration schedules (always refreshed - windows move every term)
    for term in TERMS:
        slug = term_slug(term)
        print(f"   📅 {term}...", end=" ")
        data = fetch_json(session, f"{EXPORT_URL}/registration-schedules/{slug}")
        if data is None:
            failures += 1
        else:
            save_json(data, os.path.join(SCHEDULES_DIR, f"{slug}.json"))
            print("✔️", end="")
        print("")

    # 2. Degree requirement documents (skip ones already on disk)
    for subject, degree_type in PROGRAMS:
        name = f"{subject}_{degree_type}"
        filename = os.path.join(REQUIREMENTS_DIR, f"{name}.json")
        if os.path.exists(filename):
            continue

        print(f"   🎓 {name}...", end=" ")
        data = fetch_json(session, f"{EXPORT_URL}/degree-requirements/{subject}/{degree_type}")
        if data is None:
            failures += 1
        else:
            save_json(data, filename)
            print("✔️", end="")
        print("")

        # Be polite to the export service
        time.sleep(random.uniform(0.5, 1.5))

    return failures


if __name__ == "__main__":
    if not EXPORT_URL:
        print("❌ Set REGISTRAR_EXPORT_URL to the registrar export service base URL")
        sys.exit(2)
    print("🚀 Fetching registrar term configuration")
    print("-" * 60)
    failed = run()
    print("-" * 60)
    print(f"✨ Done. Data saved to '{DATA_DIR}' ({failed} failed)")
    sys.exit(1 if failed else 0)
