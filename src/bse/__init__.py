"""BSE - marketing site backend with a blog content-management API."""

__version__ = "1.0.0"
