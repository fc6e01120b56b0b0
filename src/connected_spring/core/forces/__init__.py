"""Force elements of the spring chain."""

from .damper import Damper  # noqa: F401
from .external import ExternalForce  # noqa: F401
from .spring import Spring  # noqa: F401
