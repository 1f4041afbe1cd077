"""
URL configuration for transcription reports project.
"""

from django.contrib import admin
from django.urls import path, include
from django.conf import settings

urlpatterns = [
    path('admin/', admin.site.urls),

    # App URLs
    path('', include('apps.accounts.urls', namespace='accounts')),
    path('reports/', include('apps.reports.urls', namespace='reports')),
]

if settings.DEBUG and 'debug_toolbar' in settings.INSTALLED_APPS:
    import debug_toolbar
    urlpatterns = [
        path('__debug__/', include(debug_toolbar.urls)),
    ] + urlpatterns

# Admin site customization
admin.site.site_header = 'Transcription Reports Administration'
admin.site.site_title = 'Transcription Reports Admin'
admin.site.index_title = 'Groups, users and tasks'
