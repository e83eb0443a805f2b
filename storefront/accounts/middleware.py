# accounts/middleware.py

from django.utils.functional import SimpleLazyObject

from accounts.session import get_session_user


class ShopUserMiddleware:
    """
    Attach `request.shop_user` (lazily resolved from the session).
    Must run after SessionMiddleware.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.shop_user = SimpleLazyObject(lambda: get_session_user(request))
        return self.get_response(request)
