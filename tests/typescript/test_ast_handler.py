import pytest

from propdoc.core.engine.ast_handler import ASTHandler
from propdoc.core.error_handling import ParsingError, SourceSyntaxError


@pytest.fixture
def ast_handler():
    return ASTHandler('typescript')


def _members(root):
    interface = root.named_children[-1]
    if interface.type == 'export_statement':
        interface = interface.child_by_field_name('declaration')
    body = interface.child_by_field_name('body')
    return [child for child in body.children if child.type == 'property_signature']


def test_parse_returns_program(ast_handler):
    root, code_bytes = ast_handler.parse('interface WidgetProps {\n  show?: boolean;\n}\n')
    assert root.type == 'program'
    assert code_bytes.startswith(b'interface')


def test_parse_error_raises(ast_handler):
    with pytest.raises(SourceSyntaxError) as excinfo:
        ast_handler.parse('interface WidgetProps {\n  show?: boolean;\n')
    assert isinstance(excinfo.value, ParsingError)
    assert excinfo.value.language == 'typescript'


def test_parse_is_cached(ast_handler):
    code = 'interface WidgetProps {}\n'
    first, _ = ast_handler.parse(code)
    second, _ = ast_handler.parse(code)
    assert first.id == second.id


def test_leading_comments_in_order(ast_handler):
    code = (
        'interface WidgetProps {\n'
        '  a: string;\n'
        '  // first\n'
        '  /** second */\n'
        '  b: string;\n'
        '}\n'
    )
    root, code_bytes = ast_handler.parse(code)
    first, second = _members(root)
    assert ast_handler.get_leading_comments(first, code_bytes) == []
    assert ast_handler.get_leading_comments(second, code_bytes) == ['// first', '/** second */']


def test_leading_comments_stop_at_code(ast_handler):
    code = (
        '// belongs to the import\n'
        'import { Viewer } from "cesium";\n'
        '// belongs to the interface\n'
        'export interface WidgetProps {}\n'
    )
    root, code_bytes = ast_handler.parse(code)
    statements = [n for n in root.children if n.type != 'comment']
    assert ast_handler.get_leading_comments(statements[0], code_bytes) == ['// belongs to the import']
    assert ast_handler.get_leading_comments(statements[1], code_bytes) == ['// belongs to the interface']


def test_trailing_block_comment_extends_type(ast_handler):
    code = 'interface WidgetProps {\n  position: Cartesian3 /* Vector3-like */;\n}\n'
    root, code_bytes = ast_handler.parse(code)
    (member,) = _members(root)
    annotation = member.child_by_field_name('type')
    end = ast_handler.get_trailing_block_comments_end(annotation, member)
    assert code_bytes[annotation.start_byte:end].decode() == ': Cartesian3 /* Vector3-like */'


def test_trailing_line_comment_is_not_part_of_type(ast_handler):
    code = 'interface WidgetProps {\n  show: boolean; // shown\n}\n'
    root, code_bytes = ast_handler.parse(code)
    (member,) = _members(root)
    annotation = member.child_by_field_name('type')
    assert ast_handler.get_trailing_block_comments_end(annotation, member) == annotation.end_byte
