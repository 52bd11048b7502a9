from .managers import *
from .mixins import *
from .querysets import *
