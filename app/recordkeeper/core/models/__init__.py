from .managers import *
from .models import *
from .querysets import *
