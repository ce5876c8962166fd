# __init__.py
from .complaint_urls import urlpatterns as complaint_urls

urlpatterns = complaint_urls
