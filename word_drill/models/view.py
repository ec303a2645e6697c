"""Display layouts for the learning screen."""

from enum import Enum


class ViewMode(Enum):
    """Display layout of the word list.

    V1 shows the current word only, V2 the live queue order, V3 the
    active page in catalog order, V4 the whole catalog in catalog order.
    """

    V1 = "v1"
    V2 = "v2"
    V3 = "v3"
    V4 = "v4"
