"""
Matching against a predicate: only search once the query is long enough.

Run: python examples/search_query.py
"""
from typing import Optional

from optionkit import from_nullable


def perform_search(text: str) -> None:
    print(text)


def search(query: Optional[str], min_length: int) -> None:
    from_nullable(query).matching(lambda q: len(q) > min_length).map(perform_search)


def main():
    search("Something For test", 2)   # prints
    search(None, 3)                   # nothing
    search("ab c", 3)                 # prints, the space counts


if __name__ == "__main__":
    main()
