"""Functions for BlogPost and Author, generated at import time."""
import sys

from crudgen import bootstrap
from crudgen.binding import bind_resource

from .models import Author, BlogPost

bootstrap()

_module = sys.modules[__name__]
bind_resource(_module, "memory", BlogPost, except_=["delete", "delete!"])
bind_resource(_module, "memory", Author, preset="read_write")
