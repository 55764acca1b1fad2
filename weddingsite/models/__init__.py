from weddingsite.db.base_class import Base
from weddingsite.models.user import User
from weddingsite.models.wedding_site import WeddingSite
