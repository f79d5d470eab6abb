"""URL configuration for SpotBook project.

The `urlpatterns` list routes URLs to views. Every API route lives under
`api/`; spot-scoped booking and review routes are declared by their own
apps next to the spot routes.
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView  # type: ignore

handler404 = 'shared.api.views.not_found'
handler500 = 'shared.api.views.server_error'

urlpatterns = [
    path('admin/', admin.site.urls),
    # Application URLs
    path('api/auth/', include(('apps.users.auth_urls', 'auth'), namespace='auth')),
    path('api/', include('apps.spots.urls')),
    path('api/', include('apps.bookings.urls')),
    path('api/', include('apps.reviews.urls')),
    # drf-spectacular URLs
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
]
