# __init__.py
from .complaint_views import ComplaintViewSet
