# complaint_urls.py
from rest_framework.routers import SimpleRouter
from ..views import ComplaintViewSet

router = SimpleRouter(trailing_slash=False)
router.register(r'complaints', ComplaintViewSet, basename='complaint')

urlpatterns = router.urls

'''
GET /api/complaints?page&limit&status&priority - 민원 목록 (역할 기반)
POST /api/complaints - 민원 등록 (고객)
GET /api/complaints/{id} - 민원 상세 조회
PUT /api/complaints/{id}/assign - 기술자 배정 (관리자)
PUT /api/complaints/{id}/status - 민원 상태 변경 (기술자, 관리자)
POST /api/complaints/{id}/notes - 메모 추가 (기술자, 관리자)
GET /api/complaints/analytics/dashboard - 대시보드 통계 (관리자)
'''
