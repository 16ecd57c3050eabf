from .Vec2 import Vec2
from .Body import Body
from .world import World
