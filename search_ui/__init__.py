"""
Search front-end package for the AI Research Agent.

Import the controller and client directly from here:

```python
from search_ui import SearchController, SearchServiceClient, SearchServiceConfig

controller = SearchController(SearchServiceClient(config=SearchServiceConfig.from_env()))
controller.submit_search("market trends")
```
"""

from .api_client import (  # noqa: F401
    DecodeError,
    HttpStatusError,
    SearchServiceClient,
    SearchServiceError,
    TransportError,
)
from .config import SearchServiceConfig  # noqa: F401
from .controller import SearchController, SearchTicket  # noqa: F401

__all__ = [
    "DecodeError",
    "HttpStatusError",
    "SearchController",
    "SearchServiceClient",
    "SearchServiceConfig",
    "SearchServiceError",
    "SearchTicket",
    "TransportError",
]
