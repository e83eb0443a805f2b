# catalog/context_processors.py

from catalog.services.cart import cart_count


def cart(request):
    session = getattr(request, "session", None)
    return {"cart_count": cart_count(session) if session is not None else 0}
