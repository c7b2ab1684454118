import logging

from fastapi import APIRouter, HTTPException

from recgraph import config
from recgraph.graph import (
    ComponentNodeBuilder,
    MalformedAnnotationFormat,
    TypeRef,
    render_node,
)
from recgraph.graph.names import qualified_name
from recgraph.metrics import EvalUser, TopNMRRMetric
from recgraph.schemas import (
    ComponentNodeRequest,
    ComponentNodeResponse,
    MRRRequest,
    MRRResponse,
    SVDConfigResponse,
)
from recgraph.svd import GradientDescentSVDModule

logger = logging.getLogger(__name__)

router = APIRouter()


def _node_response(builder: ComponentNodeBuilder) -> ComponentNodeResponse:
    node = builder.build()
    return ComponentNodeResponse(
        node_id=node.node_id,
        shape=node.shape,
        fill_color=node.fill_color,
        dashed=node.dashed,
        target=node.target,
        body=node.body,
        dot=render_node(node),
        is_interface=builder.is_interface,
        is_provider=builder.is_provider,
    )


@router.post("/graph/node", response_model=ComponentNodeResponse)
def render_component_node(request: ComponentNodeRequest):
    builder = (
        ComponentNodeBuilder(
            request.identifier,
            TypeRef(request.type, is_interface=request.is_interface),
        )
        .set_shareable(request.shareable)
        .set_shared(request.shared)
        .set_is_provider(request.provider)
        .set_is_provided(request.provided)
    )

    try:
        for dep in request.dependencies:
            builder.add_dependency(TypeRef(dep.type), dep.qualifier)
        for param in request.parameters:
            builder.add_parameter(param.qualifier, param.value)
    except MalformedAnnotationFormat as e:
        logger.info("rejected node %s: %s", request.identifier, e)
        raise HTTPException(status_code=422, detail=str(e))

    return _node_response(builder)


@router.post("/metrics/mrr", response_model=MRRResponse)
def measure_mrr(request: MRRRequest):
    suffix = request.suffix if request.suffix is not None else config.MRR_SUFFIX
    metric = TopNMRRMetric(suffix=suffix)

    universe = set(request.universe)
    if not universe:
        for user in request.users:
            universe.update(user.test_items)
            universe.update(user.recommendations)

    context = metric.create_context(universe)
    users = []
    for user in request.users:
        result = metric.measure_user(
            EvalUser(user.user_id, set(user.test_items)),
            user.recommendations,
            context,
        )
        users.append({"user_id": user.user_id, **result.to_dict()})

    aggregate = metric.get_aggregate_measurements(context)
    return MRRResponse(aggregate=aggregate.to_dict(), users=users)


@router.get("/svd/config", response_model=SVDConfigResponse)
def svd_config():
    module = GradientDescentSVDModule.from_settings()

    settings = module.model_dump(exclude={"clamping_function"})
    settings["clamping_function"] = qualified_name(module.clamping_function)

    builder = ComponentNodeBuilder("svd", GradientDescentSVDModule)
    module.describe(builder)

    return SVDConfigResponse(settings=settings, node=_node_response(builder))
