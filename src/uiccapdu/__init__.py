from .errors import *
from .cla import *
from .instructions import *
from .apdu import *
