from app import create_app
from models.layout import create_app_layout
from services.state_service import SelectionStateManager, ToggleLanguage


def collect_components(root):
    found = {}
    stack = [root]
    while stack:
        node = stack.pop()
        if isinstance(node, (list, tuple)):
            stack.extend(node)
            continue
        node_id = getattr(node, 'id', None)
        if node_id:
            found[node_id] = node
        children = getattr(node, 'children', None)
        if children is not None and not isinstance(children, str):
            stack.append(children)
    return found


def test_layout_contains_every_callback_target():
    components = collect_components(create_app_layout())
    for component_id in [
        'selection-state', 'dashboard-title', 'dashboard-subtitle', 'language-toggle',
        'bar-chart-title', 'bar-chart-subtitle', 'graph-enrolment', 'doughnut-chart-title',
        'graph-breakdown', 'placeholder-note', 'download-button', 'download-data',
    ]:
        assert component_id in components


def test_layout_store_starts_from_defaults():
    store = collect_components(create_app_layout())['selection-state']
    assert store.data == {'language_code': 'en', 'selected_university_name': 'Algoma University'}
    assert store.storage_type == 'memory'


def test_layout_uses_given_state():
    manager = SelectionStateManager()
    manager.dispatch(ToggleLanguage())
    components = collect_components(create_app_layout(manager))
    assert components['language-toggle'].children == 'English'
    assert components['selection-state'].data['language_code'] == 'fr'


def test_create_app_registers_callbacks():
    app = create_app()
    keys = list(app.callback_map)
    assert 'selection-state.data' in keys
    assert 'download-data.data' in keys
    assert any('graph-breakdown.figure' in key for key in keys)
