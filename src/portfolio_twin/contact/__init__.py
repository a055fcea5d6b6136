"""Contact form delivery."""

from portfolio_twin.contact.mailer import ContactMailer, ContactSubmission

__all__ = ["ContactMailer", "ContactSubmission"]
