from app.models.base import Base  # noqa: F401
from app.models.drone import Drone, DroneStatus  # noqa: F401
from app.models.duck import Duck, HibernationStatus, SuperpowerRarity  # noqa: F401
