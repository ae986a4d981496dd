# login_probe/config.py

# Local API server
BASE_URL = "http://localhost:3000"
LOGIN_URL = f"{BASE_URL}/api/login"
HEADERS = {"Content-Type": "application/json"}

# Seeded super admin account
EMAIL = "superadmin@test.com"
PASSWORD = "Test123!"
