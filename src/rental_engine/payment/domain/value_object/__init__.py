from .payment_id import PaymentId as PaymentId
