"""
VNPay Protocol Constants

Wire-level names and fixed values shared by the URL builder and the
return verifier. Both sides must agree on these exactly.
"""
from datetime import timedelta, timezone

PAYMENT_GATEWAY_SANDBOX = "https://sandbox.vnpayment.vn/paymentv2/vpcpay.html"

VNP_VERSION = "2.1.0"
VNP_DEFAULT_COMMAND = "pay"
CURR_CODE_VND = "VND"

# Signature fields (never part of the signed material)
SECURE_HASH_FIELD = "vnp_SecureHash"
SECURE_HASH_TYPE_FIELD = "vnp_SecureHashType"

RESPONSE_CODE_FIELD = "vnp_ResponseCode"
SUCCESS_RESPONSE_CODE = "00"
WRONG_CHECKSUM_MESSAGE = "Wrong checksum"

# Asia/Ho_Chi_Minh has no DST, a fixed offset is exact
VNP_TIMEZONE = timezone(timedelta(hours=7), name="GMT+7")
VNP_DATE_FORMAT = "%Y%m%d%H%M%S"

# Amounts are sent in hundredths of the major unit
AMOUNT_MULTIPLIER = 100
