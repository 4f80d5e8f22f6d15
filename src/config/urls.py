from django.urls import include, path

from modules.products.urls import v1_router, v2_router

urlpatterns = [
    path("", include("modules.core.urls")),
    # Domain modules: versioned API
    path("api/v1/", include(v1_router.urls)),
    path("api/v2/", include(v2_router.urls)),
]

handler404 = "modules.core.views.not_found"
handler500 = "modules.core.views.server_error"
