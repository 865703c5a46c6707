"""Line-preserving editor for key/value properties files.

A file is read into two views:

    lines   every physical line in order (comments, blanks, properties),
            property lines keeping only their key/separator formatting
    index   trimmed key -> trimmed value

Edits go through the index and the line list together, so saving rewrites
only what changed:

    # app.properties
    host = localhost
    port=80

    store = LineStore("app.properties")
    store.load()
    store.set_property("port", 8080)   # "port=8080", other lines untouched
    store.set_property("debug", True)  # appended as "debug=True"
    store.save()
"""

from propline.config import PropConfig, init_config, load_config
from propline.models import LineEntry, is_property_line
from propline.store import InvalidKeyError, InvalidLineEntryError, LineStore

__all__ = [
    "InvalidKeyError",
    "InvalidLineEntryError",
    "LineEntry",
    "LineStore",
    "PropConfig",
    "init_config",
    "is_property_line",
    "load_config",
]
