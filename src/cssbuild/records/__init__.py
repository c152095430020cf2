"""Plain records and their JSON codec."""

from cssbuild.records.codec import from_json, to_json
from cssbuild.records.rectangle import Rectangle, make_rectangle

__all__ = ["Rectangle", "make_rectangle", "to_json", "from_json"]
