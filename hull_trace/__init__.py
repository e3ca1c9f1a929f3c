from .config import AnimationConfig, HullConfig, RandomPointsConfig
from .errors import (DegenerateCollinearInputError, HullCancelledError, HullConstructionError,
                     HullError, InsufficientPointsError, InvalidPointError,
                     InvalidSlopeDivisionError)
from .events import Bucket, Event, EventKind, EventTrace, NullTrace
from .geometry import Point
from .jarvis_march import jarvis_march
from .kirkpatrick_seidel import connect, convex_hull, find_bridge, upper_hull
from .run import Degeneracy, HullResult, run_convex_hull, run_jarvis_march

__version__ = "0.1.0"
