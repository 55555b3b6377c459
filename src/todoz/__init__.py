"""todoz: a small interactive todo list that keeps its tasks in ~/.todoz/todos.json."""

__version__ = "0.1.0"
