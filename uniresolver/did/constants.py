"""JSON-LD terms and bundled resource names for DID documents."""

DID_CONTEXT_URL = "urn:uniresolver:context:did-v0.11"

JSONLD_TERM_CONTEXT = "@context"
JSONLD_TERM_ID = "id"
JSONLD_TERM_TYPE = "type"
JSONLD_TERM_CONTROLLER = "controller"
JSONLD_TERM_SERVICE = "service"
JSONLD_TERM_SERVICEENDPOINT = "serviceEndpoint"
JSONLD_TERM_PUBLICKEY = "publicKey"
JSONLD_TERM_PUBLICKEYBASE58 = "publicKeyBase58"
JSONLD_TERM_PUBLICKEYBASE64 = "publicKeyBase64"
JSONLD_TERM_PUBLICKEYHEX = "publicKeyHex"
JSONLD_TERM_PUBLICKEYPEM = "publicKeyPem"
JSONLD_TERM_PUBLICKEYJWK = "publicKeyJwk"

RESOURCES_PACKAGE = "uniresolver.resources"
CONTEXT_RESOURCE = "diddocument-context.jsonld"
SKELETON_RESOURCE = "diddocument-skeleton.jsonld"
