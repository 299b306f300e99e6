"""URL configuration for the property service.

Routes the Django admin, the OpenAPI schema and the versioned property API.
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore
from drf_spectacular.views import SpectacularAPIView  # type: ignore

# API versioning. v1 is our initial version; future versions can be added here.

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    # Application URLs
    path('api/v1/', include('apps.properties.urls')),
]
