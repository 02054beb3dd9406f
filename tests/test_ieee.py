import math
import unittest
import warnings

from xcomplex.number import ieee
from xcomplex.number.ieee import Float64


class TestFloat64Kernel(unittest.TestCase):
	def test_division_by_zero(self):
		self.assertEqual(Float64.div(1.0, 0.0), math.inf)
		self.assertEqual(Float64.div(-1.0, 0.0), -math.inf)
		self.assertEqual(Float64.div(1.0, -0.0), -math.inf)
		self.assertTrue(math.isnan(Float64.div(0.0, 0.0)))

	def test_log_edges(self):
		self.assertEqual(Float64.log(0.0), -math.inf)
		self.assertTrue(math.isnan(Float64.log(-1.0)))
		self.assertEqual(Float64.log(1.0), 0.0)

	def test_exp_and_trig_edges(self):
		self.assertEqual(Float64.exp(1000.0), math.inf)
		self.assertEqual(Float64.exp(-1000.0), 0.0)
		self.assertTrue(math.isnan(Float64.cos(math.inf)))
		self.assertTrue(math.isnan(Float64.sin(-math.inf)))
		self.assertTrue(math.isnan(Float64.sqrt(-1.0)))

	def test_atan2(self):
		self.assertEqual(Float64.atan2(0.0, 0.0), 0.0)
		self.assertAlmostEqual(Float64.atan2(0.0, -1.0), math.pi, delta=1e-15)
		self.assertAlmostEqual(Float64.atan2(2.0, 1.0), math.atan2(2.0, 1.0), delta=1e-15)

	def test_no_warnings_escape(self):
		with warnings.catch_warnings():
			warnings.simplefilter("error")
			Float64.div(0.0, 0.0)
			Float64.log(0.0)
			Float64.exp(1e6)
			Float64.cos(math.inf)
			Float64.powf(0.0, -1.0)
			Float64.powi(0.0, -3)
			Float64.powi(1e200, 4)

	def test_results_are_builtin_floats(self):
		for v in (Float64.div(1, 3), Float64.sqrt(2), Float64.powi(2.0, 3), Float64.atan2(1, 1)):
			self.assertIs(type(v), float)

	def test_powf(self):
		self.assertAlmostEqual(Float64.powf(2.0, 0.5), math.sqrt(2.0), delta=1e-15)
		self.assertEqual(Float64.powf(0.0, -1.0), math.inf)

	def test_powi_binary_exponentiation(self):
		self.assertEqual(Float64.powi(2.0, 10), 1024.0)
		self.assertEqual(Float64.powi(2.0, -2), 0.25)
		self.assertEqual(Float64.powi(3.0, 0), 1.0)
		self.assertEqual(Float64.powi(math.nan, 0), 1.0)
		self.assertEqual(Float64.powi(0.0, -1), math.inf)
		self.assertEqual(Float64.powi(1e200, 4), math.inf)
		self.assertEqual(Float64.powi(math.sqrt(5.0), 2), math.sqrt(5.0) * math.sqrt(5.0))

	def test_powi_requires_integer_exponent(self):
		with self.assertRaises(TypeError):
			Float64.powi(2.0, 2.0)

	def test_module_proxies(self):
		self.assertEqual(ieee.div(1.0, 4.0), 0.25)
		self.assertEqual(ieee.powi(2.0, 3), 8.0)
		self.assertEqual(ieee.atan2(0.0, 0.0), 0.0)
		self.assertEqual(ieee.sqrt(16.0), 4.0)


if __name__ == "__main__":
	unittest.main()
