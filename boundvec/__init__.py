"""Fixed-capacity and data-free vector models."""

__version__ = "0.3.0"
__all__ = ["no_resizable_vec", "no_data_vec"]