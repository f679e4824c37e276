"""Application services layer.

Services turn domain calls into transport requests and translate outcomes
back into domain results and errors. They hold no per-call state.
"""

from accountapi.services.accounts import ACCOUNTS_PATH, AccountClient, HTTPTransport

__all__ = ["ACCOUNTS_PATH", "AccountClient", "HTTPTransport"]
