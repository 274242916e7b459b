"""Authentication: credential checks, token issuing, identity context.

Learn: Users log in with email/password and receive a self-contained
JWT. Every later request carries it as a bearer token; the identity is
rebuilt from the token alone and handed to authorization checks.
"""
