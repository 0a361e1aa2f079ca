class EnumException(Exception):
    def __init__(self, msg):
        Exception.__init__(self, msg)

class InvalidArgument(EnumException): pass

class InvalidAttribute(InvalidArgument, AttributeError):
    """ Unknown attribute reads.  Also an AttributeError so hasattr() and getattr() defaults behave. """
    def __init__(self, owner, key):
        InvalidArgument.__init__(self, "%s invalid attribute: %s" % (owner, key))
        self.key = key

class ImmutableViolation(EnumException):
    def __init__(self, owner):
        EnumException.__init__(self, "%s definition cannot be modified" % owner)
