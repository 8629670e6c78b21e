"""Client for starting and listing dedicated game servers, with a small JSON object model."""

__version__ = "0.1.0"

__all__ = ["client", "decoder", "jsonobject", "jsonvalue", "models"]