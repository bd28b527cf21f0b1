# API-response HTTP exceptions
##
class RiotApiError(Exception):
    """<base class> Raise when RiotGames API (or DataDragon) returns non-2xx response"""
    def __init__(self, requests_response):
        msg = "HTTP Error {}".format(requests_response.status_code)
        self.message = msg
        self.response = requests_response
        super(RiotApiError, self).__init__(msg)


class RateLimitedError(RiotApiError):
    """Raise when RiotGames API answers 429 (application, method or service rate limit)"""
    pass


# Exceptions that indicate "something requires re-configuring"
##
class ConfigurationError(Exception):
    """<base class> Raise when something wrongly configured, presumably fatal."""
    pass
