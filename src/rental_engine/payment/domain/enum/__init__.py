from .payment_method import PaymentMethod as PaymentMethod
