from django.contrib import admin
from django.urls import path, re_path, include
from django.http import JsonResponse


def health(request):
    return JsonResponse({'status': 'OK', 'message': 'Server is running'})

def route_not_found(request, *args, **kwargs):
    return JsonResponse({'message': 'Route not found'}, status=404)

def server_error(request, *args, **kwargs):
    return JsonResponse({'message': 'Something went wrong!'}, status=500)


urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/health', health, name='health'),
    path('api/', include('accounts.urls')),    # 인증 및 사용자 관리 API
    path('api/', include('complaints.urls')),  # 민원 API
    re_path(r'^.*$', route_not_found),
]

handler404 = route_not_found
handler500 = server_error
