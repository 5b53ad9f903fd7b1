from .document_buffer import DocumentBuffer

__all__ = ["DocumentBuffer"]
