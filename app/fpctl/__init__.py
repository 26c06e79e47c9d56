"""fpctl - command-line front end for Flatpak installations.

Reports transaction history from the system journal and lists the
contents of configured remotes.
"""

__version__ = "0.1.0"
