"""Outcome of a lookup: either Ok(value) or Err(kind, message), never an exception crossing the HTTP layer"""


class Ok:
    is_error = False

    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return 'Ok({!r})'.format(self.value)


class Err:
    is_error = True

    BAD_REQUEST = 'bad_request'
    NOT_FOUND = 'not_found'
    UPSTREAM = 'upstream'

    __statuses = {BAD_REQUEST: 400, NOT_FOUND: 404, UPSTREAM: 500}

    def __init__(self, kind, message, details=None):
        if kind not in self.__statuses:
            raise ValueError('Unknown error kind {}'.format(kind))
        self.kind = kind
        self.message = message
        self.details = details

    @property
    def status(self):
        return self.__statuses[self.kind]

    def as_dict(self):
        payload = {'error': self.message}
        if self.details:
            payload['details'] = self.details
        return payload

    def __repr__(self):
        return 'Err({!r}, {!r})'.format(self.kind, self.message)
