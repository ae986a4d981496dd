# login_probe/probe.py
import sys
import requests

from .config import LOGIN_URL, HEADERS, EMAIL, PASSWORD
from .schemas import LoginRequest, find_token

def run() -> bool:
    """Send one login request and report the outcome."""
    credentials = LoginRequest(email=EMAIL, password=PASSWORD)
    try:
        response = requests.post(LOGIN_URL, headers=HEADERS, json=credentials.model_dump())
        response.raise_for_status()
        data = response.json()
    except requests.exceptions.HTTPError as e:
        body = e.response.text if e.response is not None else ""
        print(f"Error: {body or str(e)}", file=sys.stderr)
        return False
    except requests.exceptions.RequestException as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        return False

    print(f"Success: {response.text}")

    found = find_token(data)
    if found:
        announcement, token = found
        print(f"\n✅ {announcement}")
        print(f"Token: {token}")
    return True

def main() -> int:
    return 0 if run() else 1

if __name__ == "__main__":
    sys.exit(main())
