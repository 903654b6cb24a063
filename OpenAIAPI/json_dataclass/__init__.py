from .implementation import *
