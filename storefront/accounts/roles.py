# accounts/roles.py

# =========================================================
# ROLE CONSTANTS
# =========================================================
# Stored on the `role` field of users in the record service.
ROLE_ADMIN = "admin"
ROLE_USER = "user"

ROLE_CHOICES = [
    (ROLE_USER, "User"),
    (ROLE_ADMIN, "Admin"),
]

CONSOLE_ROLES = {ROLE_ADMIN}
