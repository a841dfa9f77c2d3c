class ErrorCodes:
    """
    Validation error codes. Messages can change, but the codes will not::

        result = gateway.transaction.sale({})
        assert result.errors.for_object("transaction").on("amount")[0].code == ErrorCodes.Transaction.AmountIsRequired
    """

    class CreditCard:
        CardholderNameIsTooLong = "81723"
        CvvIsInvalid = "81707"
        CvvIsRequired = "81706"
        ExpirationDateIsInvalid = "81710"
        ExpirationDateIsRequired = "81709"
        NumberHasInvalidLength = "81716"
        NumberIsInvalid = "81715"
        NumberIsRequired = "81714"
        NumberMustBeTestNumber = "81717"
        PaymentMethodNonceCardTypeIsNotAccepted = "91734"
        PaymentMethodNonceConsumed = "91731"
        PaymentMethodNonceLocked = "91733"
        PaymentMethodNonceUnknown = "91732"
        TokenIsInvalid = "91718"

    class PaymentMethod:
        CannotForwardPaymentMethodType = "93106"
        PaymentMethodParamsAreRequired = "93101"
        PaymentMethodNonceConsumed = "93107"
        PaymentMethodNonceUnknown = "93108"
        PaymentMethodNonceLocked = "93109"

    class Transaction:
        AmountCannotBeNegative = "81501"
        AmountIsInvalid = AmountFormatIsInvalid = "81503"
        AmountIsRequired = "81502"
        AmountIsTooLarge = "81528"
        AmountMustBeGreaterThanZero = "81531"
        CannotBeVoided = "91504"
        CannotCancelRelease = "91562"
        CannotCloneCredit = "91543"
        CannotCloneUnsuccessfulTransaction = "91542"
        CannotHoldInEscrow = "91560"
        CannotPartiallyRefundEscrowedTransaction = "91563"
        CannotRefundCredit = "91505"
        CannotRefundUnlessSettled = "91506"
        CannotReleaseFromEscrow = "91561"
        CannotSubmitForSettlement = "91507"
        CreditCardIsRequired = "91508"
        CustomFieldIsInvalid = "91526"
        CustomerIdIsInvalid = "91510"
        HasAlreadyBeenRefunded = "91512"
        MerchantAccountIdIsInvalid = "91513"
        OrderIdIsTooLong = "91501"
        PaymentMethodConflict = "91515"
        PaymentMethodNonceUnknown = "91565"
        PaymentMethodTokenIsInvalid = "91518"
        RefundAmountIsTooLarge = "91521"
        SettlementAmountIsTooLarge = "91522"
        TaxAmountCannotBeNegative = "81534"
        TaxAmountFormatIsInvalid = "81535"
        TaxAmountIsTooLarge = "81536"
        TypeIsInvalid = "91523"
        TypeIsRequired = "91524"

        class Options:
            SubmitForSettlementIsRequiredForCloning = "91544"
            VaultIsDisabled = "91525"
