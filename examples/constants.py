import os

PUBLIC_KEY = os.getenv("GENGO_PUBLIC_KEY", "")
PRIVATE_KEY = os.getenv("GENGO_PRIVATE_KEY", "")

# ----------------------------------------------------------------------
# Examples always run against the sandbox; nothing is billed there.
# ----------------------------------------------------------------------
SANDBOX = True
