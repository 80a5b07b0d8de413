from django.contrib import admin
from django.urls import include, path

# -----------------------
# Main URL patterns
# -----------------------
urlpatterns = [
    path("admin/", admin.site.urls),    # Tag and playground management
    path("", include("api.urls")),      # Modern and legacy playground APIs
]
