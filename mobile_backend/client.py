# mobile_backend/client.py
import requests

from .config import BACKEND_URL, HTTP_TIMEOUT_SEC

headers = {
    "Accept": "application/json",
}

def _url(path, base_url=None):
    return f"{(base_url or BACKEND_URL).rstrip('/')}{path}"

def get_greeting(base_url=None):
    r = requests.get(_url("/", base_url), timeout=HTTP_TIMEOUT_SEC)
    r.raise_for_status()
    return r.text

def send_data(payload, base_url=None):
    r = requests.post(_url("/api/data", base_url), headers=headers, json=payload, timeout=HTTP_TIMEOUT_SEC)
    r.raise_for_status()
    return r.json()
