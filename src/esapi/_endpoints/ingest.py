from .._utils._endpoint import Endpoint, Param
from ._common import BOOL, MASTER_TIMEOUT, TIMEOUTS

DELETE_PIPELINE = Endpoint(
    "ingest.delete_pipeline", "DELETE", "/_ingest/pipeline/{id}", params=TIMEOUTS
)

GET_PIPELINE = Endpoint(
    "ingest.get_pipeline", "GET", "/_ingest/pipeline/{id?}", params=MASTER_TIMEOUT
)

PROCESSOR_GROK = Endpoint("ingest.processor_grok", "GET", "/_ingest/processor/grok")

PUT_PIPELINE = Endpoint(
    "ingest.put_pipeline",
    "PUT",
    "/_ingest/pipeline/{id}",
    params=TIMEOUTS,
    body=True,
)

SIMULATE = Endpoint(
    "ingest.simulate",
    "POST",
    "/_ingest/pipeline/{id?}/_simulate",
    params=(Param("verbose", BOOL),),
    body=True,
)

ENDPOINTS = (DELETE_PIPELINE, GET_PIPELINE, PROCESSOR_GROK, PUT_PIPELINE, SIMULATE)
