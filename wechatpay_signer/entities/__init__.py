from .authorization import AuthorizationResult as AuthorizationResult
from .authorization import SigningRequest as SigningRequest
from .errors import ErrorType, SigningEngineErrorType
from .exceptions import KeyLoadError, NotInitializedError, SigningEngineError, SigningError
from .result import Err, Ok, Result
