# accounts/context_processors.py

from accounts.users import AnonymousShopUser


def shop_user(request):
    """Expose the signed-in user to every template as `current_user`."""
    return {"current_user": getattr(request, "shop_user", None) or AnonymousShopUser()}
