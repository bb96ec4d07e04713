from google.protobuf.wrappers_pb2 import Int32Value, StringValue

from ledgercore.codec import ProtobufCodec, encode_message
from ledgercore.dispatcher import ProtobufDispatcher


def _recorder(log, tag):
    return lambda conn, msg, ts: log.append((tag, conn, msg, ts))


def test_registered_type_goes_to_its_callback():
    log = []
    dispatcher = ProtobufDispatcher(_recorder(log, "default"))
    dispatcher.register(StringValue, _recorder(log, "string"))
    message = StringValue(value="hi")
    dispatcher.dispatch("conn", message, 2.5)
    assert log == [("string", "conn", message, 2.5)]


def test_unregistered_type_goes_to_default():
    log = []
    dispatcher = ProtobufDispatcher(_recorder(log, "default"))
    dispatcher.register(StringValue, _recorder(log, "string"))
    message = Int32Value(value=3)
    dispatcher.dispatch(None, message, 0.0)
    assert log == [("default", None, message, 0.0)]


def test_register_by_descriptor():
    log = []
    dispatcher = ProtobufDispatcher(_recorder(log, "default"))
    dispatcher.register_descriptor(Int32Value.DESCRIPTOR, _recorder(log, "int"))
    dispatcher.dispatch(None, Int32Value(value=1), 0.0)
    assert [entry[0] for entry in log] == ["int"]


def test_later_registration_replaces_earlier():
    log = []
    dispatcher = ProtobufDispatcher(_recorder(log, "default"))
    dispatcher.register(StringValue, _recorder(log, "first"))
    dispatcher.register(StringValue, _recorder(log, "second"))
    dispatcher.dispatch(None, StringValue(), 0.0)
    assert [entry[0] for entry in log] == ["second"]


def test_codec_feeds_dispatcher():
    log = []
    dispatcher = ProtobufDispatcher(_recorder(log, "default"))
    dispatcher.register(StringValue, _recorder(log, "string"))
    codec = ProtobufCodec(dispatcher.dispatch)
    codec.feed("c", encode_message(StringValue(value="a")) + encode_message(Int32Value(value=9)), 1.0)
    assert [(tag, msg) for tag, _, msg, _ in log] == [
        ("string", StringValue(value="a")),
        ("default", Int32Value(value=9)),
    ]