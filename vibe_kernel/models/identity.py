"""Identity — the opaque caller token every operation is attributed to."""

from typing import NewType

Identity = NewType("Identity", str)

# Principal the hosting runtime assigns to unauthenticated callers.
# Never ranked on the top-creators board.
ANONYMOUS_IDENTITY = Identity("2vxsx-fae")
