# __init__.py
from .auth_views import RegisterView, LoginView, MeView
from .user_views import UserViewSet
