from dataclasses import dataclass
from typing import Optional


@dataclass
class Author:
    name: str
    email: str
    id: Optional[int] = None


@dataclass
class BlogPost:
    title: str
    author_id: int
    body: str = ""
    published: bool = False
    id: Optional[int] = None
