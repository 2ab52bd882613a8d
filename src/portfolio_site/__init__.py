__version__ = "0.1.0"


def main() -> None:
    """Entry point for the application: serve the site on the default port."""
    from portfolio_site.api.main import main as serve

    serve()
