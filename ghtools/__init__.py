"""
ghtools - a small client and command-line toolkit for the GitHub v3 API.

Works against github.com and GitHub Enterprise hosts and provides:
- Authenticated requests with token or basic credentials
- Automatic pagination following
- Verbose request/response tracing
- Thin commands for search, commit statuses and branch protection
"""

__version__ = "0.1.0"
__app_name__ = "ghtools"
