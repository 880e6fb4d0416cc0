from django.conf import settings
from rest_framework_simplejwt.authentication import JWTAuthentication


class CookieJWTAuthentication(JWTAuthentication):
    """
    Custom JWT authentication class for Playgate.

    Authentication flow:
    1) Attempts to read and validate the JWT access token from an HttpOnly cookie (default: "pg_access").
       This is how the web activation page is signed in.
    2) If no cookie is found, falls back to the standard "Authorization: Bearer <token>" header.
       Paired TVs send their device session this way.
    """

    def authenticate(self, request):
        cookie_name = getattr(settings, "JWT_ACCESS_COOKIE_NAME", "pg_access")
        raw_token = request.COOKIES.get(cookie_name)
        if raw_token:
            validated = self.get_validated_token(raw_token)
            return (self.get_user(validated), validated)

        return super().authenticate(request)
