from .quote_rental import QuoteRentalService as QuoteRentalService
