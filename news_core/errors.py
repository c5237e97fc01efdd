##########################################################################################
#
# Script name: errors.py
#
# Description: Exceptions signalling a failed upstream attempt inside the news core.
#
##########################################################################################


# ****************************************************************************************
# Exceptions
# ****************************************************************************************


class NewsError(Exception):
    '''
    Base class for exceptions in this package.
    '''
    pass


class FeedError(NewsError):
    '''
    A single publisher feed endpoint could not be fetched or parsed.
    '''
    def __init__(self, url, reason):
        self.url = url
        self.reason = reason
        self.message = f'Failed to read feed {url}: {reason}'
        super().__init__(self.message)


class ProviderError(NewsError):
    '''
    The headline provider returned a transport failure or a non-ok payload.
    '''
    def __init__(self, endpoint, reason):
        self.endpoint = endpoint
        self.reason = reason
        self.message = f'Headline provider request to {endpoint} failed: {reason}'
        super().__init__(self.message)
