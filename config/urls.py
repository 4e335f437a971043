from django.urls import path, include

urlpatterns = [
    path('api/catalog/', include('apps.catalog.api.urls')),
]
