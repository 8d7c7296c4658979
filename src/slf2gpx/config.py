"""Converter-wide constants."""

GPX_NAMESPACE = "http://www.topografix.com/GPX/1/1"
GPX_VERSION = "1.1"
GPX_SCHEMA_LOCATION = f"{GPX_NAMESPACE} http://www.topografix.com/GPX/1/1/gpx.xsd"
XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"

CREATOR = "slf2gpx"

# Attribution written into every GPX <metadata><author>
AUTHOR_NAME = "slf2gpx"
AUTHOR_EMAIL_ID = "christoph.hess"
AUTHOR_EMAIL_DOMAIN = "live.de"

SLF_SUFFIX = ".slf"
GPX_SUFFIX = ".gpx"

SERVER_HOST = "0.0.0.0"
SERVER_PORT = 8000
