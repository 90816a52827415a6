"""Auth domain module.

This domain owns credential-based identity: user records keyed by email and
biometric key, password hashing, and bearer token issuance. Transport and
storage engines live in the infrastructure layer behind the ports defined here.
"""
