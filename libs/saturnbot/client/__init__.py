from saturnbot.client.saturn_client import DEFAULT_API_URL, SaturnClient

__all__ = ["DEFAULT_API_URL", "SaturnClient"]
