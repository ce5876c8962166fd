# user_urls.py
from rest_framework.routers import SimpleRouter
from ..views import UserViewSet

router = SimpleRouter(trailing_slash=False)
router.register(r'users', UserViewSet, basename='user')

urlpatterns = router.urls

'''
GET /api/users?page&limit&role → list: 활성 사용자 목록
POST /api/users/create → create_staff: 기술자/관리자 계정 생성
GET /api/users/technicians → technicians: 활성 기술자 목록
PUT /api/users/{id}/toggle-status → toggle_status: 계정 활성화/비활성화 전환
'''
