import unittest

from optionkit import Option, Some, NONE, from_nullable, matching, or_else_throw, Failure, Ok, Err


class Recorder:
    def __init__(self, result=None):
        self.calls = []
        self.result = result

    def __call__(self, *args):
        self.calls.append(args)
        return self.result


class TestOptionBasics(unittest.TestCase):
    def test_option(self):
        self.assertTrue(isinstance(Some(1), Option))
        self.assertEqual(Some(2).map(lambda x: x+1).value, 3)
        self.assertTrue(NONE.is_none())
        self.assertEqual(from_nullable(None).get_or_else(5), 5)
        self.assertEqual(Some(1).flat_map(lambda x: NONE), NONE)

    def test_some_none_is_present(self):
        self.assertTrue(Some(None).is_some())
        self.assertIsNone(Some(None).to_nullable())
        self.assertIs(from_nullable(None), NONE)

    def test_lazy_default_and_if_some(self):
        seen = []
        self.assertEqual(NONE.get_or_else_get(lambda: 7), 7)
        self.assertEqual(Some(1).get_or_else_get(lambda: 1 / 0), 1)
        o = Some("x")
        self.assertIs(o.if_some(seen.append), o)
        NONE.if_some(seen.append)
        self.assertEqual(seen, ["x"])


class TestMatching(unittest.TestCase):
    def test_present_and_accepted_keeps_value(self):
        o = Some("abc")
        p = Recorder(True)
        self.assertIs(o.matching(p), o)
        self.assertEqual(p.calls, [("abc",)])

    def test_present_and_rejected_is_absent(self):
        p = Recorder(False)
        self.assertIs(Some("abc").matching(p), NONE)
        self.assertEqual(len(p.calls), 1)

    def test_absent_never_calls_predicate(self):
        p = Recorder(True)
        self.assertIs(NONE.matching(p), NONE)
        self.assertEqual(p.calls, [])

    def test_function_form_and_filter_alias(self):
        self.assertEqual(matching(Some(4), lambda n: n % 2 == 0), Some(4))
        self.assertIs(Some(3).filter(lambda n: n % 2 == 0), NONE)

    def test_input_is_not_mutated(self):
        o = Some([1, 2])
        o.matching(lambda xs: False)
        self.assertEqual(o.value, [1, 2])


class TestSearchChain(unittest.TestCase):
    def setUp(self):
        self.searched = []

    def perform_search(self, text):
        self.searched.append(text)

    def test_long_enough_query_reaches_handler(self):
        from_nullable("Something For test").matching(lambda s: len(s) > 2).map(self.perform_search)
        self.assertEqual(self.searched, ["Something For test"])

    def test_missing_query_never_reaches_handler(self):
        from_nullable(None).matching(lambda s: len(s) > 3).map(self.perform_search)
        self.assertEqual(self.searched, [])

    def test_query_with_space_counts_every_character(self):
        from_nullable("ab c").matching(lambda s: len(s) > 3).map(self.perform_search)
        self.assertEqual(self.searched, ["ab c"])

    def test_short_query_is_dropped(self):
        from_nullable("ab").matching(lambda s: len(s) > 2).map(self.perform_search)
        self.assertEqual(self.searched, [])


class PreparationFailed(Exception):
    pass


class TestOrElseThrow(unittest.TestCase):
    def test_present_returns_value_without_supplier(self):
        supplier = Recorder(PreparationFailed())
        self.assertEqual(Some(3).or_else_throw(supplier), 3)
        self.assertEqual(supplier.calls, [])

    def test_absent_raises_supplied_exception_once(self):
        err = PreparationFailed("no image")
        supplier = Recorder(err)
        with self.assertRaises(PreparationFailed) as cm:
            NONE.or_else_throw(supplier)
        self.assertIs(cm.exception, err)
        self.assertEqual(len(supplier.calls), 1)

    def test_exception_class_is_instantiated(self):
        with self.assertRaises(PreparationFailed):
            or_else_throw(NONE, lambda: PreparationFailed)
        with self.assertRaises(PreparationFailed):
            or_else_throw(NONE, PreparationFailed)

    def test_exception_class_needing_arguments_is_not_supported(self):
        class Rejected(Exception):
            def __init__(self, reason):
                super().__init__(reason)

        with self.assertRaises(TypeError):
            NONE.or_else_throw(lambda: Rejected)
        with self.assertRaises(Rejected):
            NONE.or_else_throw(lambda: Rejected("too small"))

    def test_plain_error_value_is_wrapped_in_failure(self):
        with self.assertRaises(Failure) as cm:
            NONE.or_else_throw(lambda: "preparation-failed")
        self.assertEqual(cm.exception.error, "preparation-failed")
        self.assertEqual(str(cm.exception), "'preparation-failed'")

    def test_supplier_exception_propagates(self):
        def broken():
            raise KeyError("supplier")
        with self.assertRaises(KeyError):
            NONE.or_else_throw(broken)

    def test_chained_pipeline_stops_at_first_absent_step(self):
        steps = []

        def watermark(img):
            steps.append("watermark")
            return None

        def encrypt(img):
            steps.append("encrypt")
            return img

        def prepare(img):
            w = from_nullable(watermark(img)).or_else_throw(PreparationFailed)
            return from_nullable(encrypt(w)).or_else_throw(PreparationFailed)

        with self.assertRaises(PreparationFailed):
            prepare(object())
        self.assertEqual(steps, ["watermark"])


class TestOkOrElse(unittest.TestCase):
    def test_present_is_ok_and_supplier_unused(self):
        supplier = Recorder("e")
        r = Some(1).ok_or_else(supplier)
        self.assertEqual(r, Ok(1))
        self.assertEqual(supplier.calls, [])

    def test_absent_is_err_with_supplier_called_once(self):
        supplier = Recorder("missing")
        r = NONE.ok_or_else(supplier)
        self.assertTrue(isinstance(r, Err))
        self.assertEqual(r.error, "missing")
        self.assertEqual(len(supplier.calls), 1)
