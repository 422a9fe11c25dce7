"""next-firebase -- scaffold a Next.js app backed by Firebase.

Creates the project tree (Firebase config, Cloud Functions, Next.js frontend,
security rules) and installs its npm dependencies.
"""

__version__ = "1.0.0"
