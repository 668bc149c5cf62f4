# app/domain/errors.py


class NotFoundError(LookupError):
    """Zasob (produkt, pozycja koszyka, zamowienie, user) nie istnieje."""
