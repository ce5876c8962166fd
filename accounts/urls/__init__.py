# __init__.py
from .auth_urls import urlpatterns as auth_urls
from .user_urls import urlpatterns as user_urls

urlpatterns = auth_urls + user_urls
