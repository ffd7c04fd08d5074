from .insertion_error import InsertionError

__all__: list[str] = ["InsertionError"]
