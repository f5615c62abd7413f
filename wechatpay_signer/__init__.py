from .entities import (AuthorizationResult, Err, KeyLoadError, NotInitializedError, Ok,
                       SigningEngineError, SigningError, SigningRequest)
from .signing import (AUTHORIZATION_SCHEME, KeyMaterial, KeyMaterialStore, SigningEngine,
                      load_from_pem, load_from_pkcs12)
