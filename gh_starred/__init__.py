"""List and filter your starred GitHub repositories.

Starred repositories are fetched several pages at a time, cached for the
life of the process, and can be explored from an interactive shell with
fuzzy completion of commands, flags, and topics.
"""

from .cache import ResultCache
from .cli import main
from .completion import complete
from .models import Repository, Suggestion

__all__ = ["main", "complete", "Repository", "ResultCache", "Suggestion"]

if __name__ == "__main__":
    main()
