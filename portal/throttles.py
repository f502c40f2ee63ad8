from rest_framework.throttling import AnonRateThrottle, UserRateThrottle


class SignInThrottle(AnonRateThrottle):
    scope = 'sign_in'


class SignUpThrottle(AnonRateThrottle):
    scope = 'sign_up'


class BookingThrottle(UserRateThrottle):
    scope = 'booking'


class EnquirySubmitThrottle(UserRateThrottle):
    scope = 'enquiry_submit'
