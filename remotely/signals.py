from blinker import Namespace

_remotely = Namespace()

before_request = _remotely.signal('before-request')

after_request = _remotely.signal('after-request')

association_loaded = _remotely.signal('association-loaded')
