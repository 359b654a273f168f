"""HTTP contract tests driven through the FastAPI app."""
