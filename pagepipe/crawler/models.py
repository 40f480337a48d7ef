# pagepipe/crawler/models.py
"""
Data models for the PagePipe discovery crawler.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Literal, Optional, Tuple, overload

DiscoverySource = Literal["sitemap", "links"]


@dataclass(slots=True)
class PageData:
    """A fetched page: the URL it came from, its decoded body and HTTP status."""

    url: str
    content: str
    status: Optional[int] = None


@dataclass(frozen=True, slots=True)
class DiscoveryResult:
    """Ordered, immutable outcome of one discovery run."""

    start_url: str
    source: DiscoverySource
    urls: Tuple[str, ...]

    def __iter__(self) -> Iterator[str]:
        return iter(self.urls)

    def __len__(self) -> int:
        return len(self.urls)

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[str, ...]: ...

    def __getitem__(self, index):
        return self.urls[index]

    def to_dict(self) -> dict:
        return {
            "start_url": self.start_url,
            "source": self.source,
            "count": len(self.urls),
            "urls": list(self.urls),
        }
