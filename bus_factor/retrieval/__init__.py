"""GitHub REST retrieval: search pagination and contributor fetches."""
