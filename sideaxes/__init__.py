# module to create side axes, sharing an edge with an existing axes

from .figax import *
from .params import *

from .view import AxesView, units_scope
from .link import ViewLink
from .viewmtx import viewmtx, find_axis, CARDINAL_VIEWS
from .geometry import side_position
from .size import convert_unit
