"""
Unit tests for the Mongoose model generator.
"""
from modelgen.codegen import generate_mongoose_model
from modelgen.schemas import FieldSpec, ModuleStyle

EXPECTED_USER_MODEL = """\
import mongoose from 'mongoose';

const { Schema } = mongoose;
const { Mixed } = Schema.Types;

const UserSchema = new Schema({
  age: {
    type: Number,
    required: true,
    unique: false,
    default: null,
  },
}, {
  collection: 'users',
  timestamps: true,
});

const User = mongoose.model('User', UserSchema);

export default User;"""


def test_full_output(user_description):
    assert generate_mongoose_model(user_description) == EXPECTED_USER_MODEL


def test_commonjs_header_and_export(user_description):
    user_description.module_style = ModuleStyle.COMMON_JS
    code = generate_mongoose_model(user_description)
    assert code.startswith("const mongoose = require('mongoose');\n")
    assert code.endswith("module.exports = User;")


def test_required_passes_through(user_description):
    user_description.add_field(FieldSpec(name="bio", type="text", required=False))
    code = generate_mongoose_model(user_description)
    bio_block = code[code.index("  bio: {"):]
    assert "type: String," in bio_block
    assert "required: false," in bio_block


def test_default_value_quoting(user_description):
    user_description.add_field(FieldSpec(name="status", type="string", default_value="active"))
    code = generate_mongoose_model(user_description)
    assert "default: null," in code
    assert "default: 'active'," in code


def test_mixed_types(user_description):
    user_description.add_field(FieldSpec(name="tags", type="array"))
    user_description.add_field(FieldSpec(name="meta", type="object"))
    code = generate_mongoose_model(user_description)
    assert "type: [Mixed]," in code
    assert "type: Mixed," in code


def test_collection_and_timestamps_options(user_description):
    user_description.table_name = "people"
    user_description.use_timestamps = False
    code = generate_mongoose_model(user_description)
    assert "  collection: 'people',\n  timestamps: false,\n});" in code


def test_empty_fields(empty_description):
    code = generate_mongoose_model(empty_description)
    assert "const UserSchema = new Schema({\n}, {\n" in code


def test_empty_model_name_is_emitted_verbatim(user_description):
    user_description.model_name = ""
    code = generate_mongoose_model(user_description)
    assert "const Schema = new Schema({" in code
    assert "const  = mongoose.model('', Schema);" in code
    assert code.endswith("export default ;")


def test_special_characters_pass_through_unescaped(user_description):
    user_description.add_field(FieldSpec(name="motto", type="string", default_value="it's"))
    assert "default: 'it's'," in generate_mongoose_model(user_description)
