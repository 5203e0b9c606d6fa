import unittest
import warnings
import numpy as np
from navcore.coordinate.frames import (
    lla2ecef, ecef2lla, lla2R_EinN, lla2R_NinE,
    lla2base, ecef2base, pos_ned2ecef, vel_ecef2ned
)
from navcore.core.constants import E_MAJOR, E_MINOR
from navcore.core.precision import numeric_config


class TestGeodeticConversions(unittest.TestCase):

    def setUp(self):
        self.tokyo_lla = np.array([np.radians(35.6762), np.radians(139.6503), 40.0])
        self.newyork_lla = np.array([np.radians(40.7128), np.radians(-74.0060), 10.0])
        self.southern_lla = np.array([np.radians(-35.0), np.radians(150.0), 100.0])

    def test_lla2ecef_ecef2lla_round_trip(self):
        # ecef2lla returns degrees, the input is in radians
        test_points = [
            self.tokyo_lla,
            self.newyork_lla,
            self.southern_lla,
            np.array([0.0, 0.0, 0.0]),
            np.array([np.radians(88.9), np.radians(-120.0), 250.0]),
            np.array([np.radians(-88.9), np.radians(179.5), -1000.0]),
        ]

        for lla in test_points:
            lla_deg = ecef2lla(lla2ecef(lla))

            np.testing.assert_allclose(lla_deg[:2], np.degrees(lla[:2]), rtol=0, atol=1e-7,
                                       err_msg=f"Round-trip failed for lat/lon {lla}")
            np.testing.assert_allclose(lla_deg[2], lla[2], rtol=0, atol=1e-2,
                                       err_msg=f"Round-trip failed for height {lla}")

    def test_round_trip_over_altitude_range(self):
        for h in [-1000.0, 0.0, 100.0, 1000.0, 10000.0, 50000.0]:
            for lat_deg in [-80.0, -45.0, -10.0, 0.0, 30.0, 60.0, 85.0]:
                lla = np.array([np.radians(lat_deg), np.radians(10.0), h])
                lla_deg = ecef2lla(lla2ecef(lla))

                self.assertAlmostEqual(lla_deg[0], lat_deg, delta=1e-6)
                self.assertAlmostEqual(lla_deg[1], 10.0, delta=1e-9)
                self.assertAlmostEqual(lla_deg[2], h, delta=0.1)

    def test_lla2ecef_known_values(self):
        # Equator, prime meridian, sea level: on the X-axis at the semi-major axis
        ecef = lla2ecef(np.array([0.0, 0.0, 0.0]))
        self.assertAlmostEqual(ecef[0], E_MAJOR, places=3)
        self.assertAlmostEqual(ecef[1], 0.0, places=3)
        self.assertAlmostEqual(ecef[2], 0.0, places=3)

        # North pole: on the Z-axis at the semi-minor axis
        ecef = lla2ecef(np.array([np.pi / 2, 0.0, 0.0]))
        self.assertAlmostEqual(ecef[0], 0.0, places=3)
        self.assertAlmostEqual(ecef[1], 0.0, places=3)
        self.assertAlmostEqual(ecef[2], E_MINOR, places=3)

        # 90 deg east, 1000 m up
        ecef = lla2ecef(np.array([0.0, np.pi / 2, 1000.0]))
        self.assertAlmostEqual(ecef[0], 0.0, places=3)
        self.assertAlmostEqual(ecef[1], E_MAJOR + 1000.0, places=3)

    def test_lla2ecef_is_double_precision(self):
        ecef = lla2ecef(self.tokyo_lla.astype(np.float32))
        self.assertEqual(ecef.dtype, np.float64)

    def test_ecef2lla_returns_degrees(self):
        lla_deg = ecef2lla(np.array([0.0, E_MAJOR, 0.0]))

        self.assertAlmostEqual(lla_deg[0], 0.0, places=10)
        self.assertAlmostEqual(lla_deg[1], 90.0, places=10)  # degrees, not pi/2
        self.assertAlmostEqual(lla_deg[2], 0.0, places=3)

    def test_ecef2lla_overflow_is_silent(self):
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            lla_deg = ecef2lla(np.array([1e200, 0.0, 0.0]))

        self.assertEqual(lla_deg[0], 0.0)
        self.assertEqual(lla_deg[1], 0.0)
        self.assertTrue(np.isposinf(lla_deg[2]))

        lla_deg = ecef2lla(np.array([-E_MAJOR, 0.0, 0.0]))
        self.assertAlmostEqual(abs(lla_deg[1]), 180.0, places=10)


class TestRotationMatrices(unittest.TestCase):

    def setUp(self):
        self.test_points = [
            np.array([0.0, 0.0, 0.0]),
            np.array([np.radians(35.6762), np.radians(139.6503), 40.0]),
            np.array([np.radians(-62.0), np.radians(-58.0), 0.0]),
            np.array([np.radians(89.0), np.radians(179.0), 0.0]),
            np.array([np.radians(12.5), np.radians(-179.9), 0.0]),
        ]

    def test_R_EinN_orthonormal(self):
        for lla in self.test_points:
            R = lla2R_EinN(lla, dtype=np.float64)

            np.testing.assert_allclose(np.linalg.norm(R, axis=1), np.ones(3), atol=1e-12)
            self.assertAlmostEqual(R[0] @ R[1], 0.0, places=12)
            self.assertAlmostEqual(R[0] @ R[2], 0.0, places=12)
            self.assertAlmostEqual(R[1] @ R[2], 0.0, places=12)
            self.assertAlmostEqual(np.linalg.det(R), 1.0, places=10)

    def test_R_NinE_orthonormal(self):
        for lla in self.test_points:
            R = lla2R_NinE(lla, dtype=np.float64)

            np.testing.assert_allclose(R @ R.T, np.eye(3), atol=1e-12)
            self.assertAlmostEqual(np.linalg.det(R), 1.0, places=10)

    def test_inverse_consistency(self):
        for lla in self.test_points:
            R_EinN = lla2R_EinN(lla, dtype=np.float64)
            R_NinE = lla2R_NinE(lla, dtype=np.float64)

            np.testing.assert_allclose(R_NinE @ R_EinN, np.eye(3), atol=1e-12)
            np.testing.assert_allclose(R_EinN @ R_NinE, np.eye(3), atol=1e-12)

    def test_R_EinN_axes_at_origin(self):
        R = lla2R_EinN(np.array([0.0, 0.0, 0.0]), dtype=np.float64)

        # ECEF Z-axis points north, ECEF X-axis points up at lat=lon=0
        np.testing.assert_allclose(R @ np.array([0.0, 0.0, 1.0]), [1.0, 0.0, 0.0], atol=1e-15)
        np.testing.assert_allclose(R @ np.array([1.0, 0.0, 0.0]), [0.0, 0.0, -1.0], atol=1e-15)
        np.testing.assert_allclose(R @ np.array([0.0, 1.0, 0.0]), [0.0, 1.0, 0.0], atol=1e-15)

    def test_single_precision(self):
        lla = self.test_points[1]
        R_EinN = lla2R_EinN(lla, dtype='float32')
        R_NinE = lla2R_NinE(lla, dtype='float32')

        self.assertEqual(R_EinN.dtype, np.float32)
        self.assertEqual(R_NinE.dtype, np.float32)
        np.testing.assert_allclose(R_NinE @ R_EinN, np.eye(3), atol=1e-6)
        np.testing.assert_allclose(R_EinN, lla2R_EinN(lla, dtype='float64'), atol=1e-6)


class TestBaseFrame(unittest.TestCase):

    def setUp(self):
        self.origin_lla = np.array([np.radians(37.39), np.radians(-122.08), 20.0])
        self.ecef_init = lla2ecef(self.origin_lla)

    def tearDown(self):
        numeric_config.reset()

    def test_lla2base_at_origin(self):
        R_NinE, dr_N, ecef = lla2base(self.origin_lla, self.ecef_init, dtype=np.float64)

        np.testing.assert_allclose(dr_N, np.zeros(3), atol=1e-9)
        np.testing.assert_allclose(ecef, self.ecef_init, rtol=0, atol=1e-9)
        np.testing.assert_allclose(R_NinE, lla2R_NinE(self.origin_lla, dtype=np.float64), atol=1e-15)

    def test_lla2base_vertical_offset(self):
        lla = self.origin_lla + np.array([0.0, 0.0, 100.0])
        _, dr_N, _ = lla2base(lla, self.ecef_init, dtype=np.float64)

        np.testing.assert_allclose(dr_N, [0.0, 0.0, -100.0], atol=1e-6)

    def test_lla2base_horizontal_offsets(self):
        # ~111 m north
        lla = self.origin_lla + np.array([np.radians(0.001), 0.0, 0.0])
        _, dr_N, _ = lla2base(lla, self.ecef_init, dtype=np.float64)
        self.assertGreater(dr_N[0], 100.0)
        self.assertLess(abs(dr_N[1]), 1e-6)

        # east
        lla = self.origin_lla + np.array([0.0, np.radians(0.001), 0.0])
        _, dr_N, _ = lla2base(lla, self.ecef_init, dtype=np.float64)
        self.assertGreater(dr_N[1], 50.0)
        self.assertLess(abs(dr_N[0]), 1e-2)

    def test_lla2base_matches_matrix_product(self):
        lla = self.origin_lla + np.array([np.radians(0.01), np.radians(-0.02), 35.0])
        R_NinE, dr_N, ecef = lla2base(lla, self.ecef_init, dtype=np.float64)

        np.testing.assert_allclose(ecef, lla2ecef(lla), rtol=0, atol=1e-9)
        np.testing.assert_allclose(dr_N, R_NinE.T @ (ecef - self.ecef_init), atol=1e-8)

    def test_ecef2base_matches_lla2base(self):
        lla = self.origin_lla + np.array([np.radians(-0.003), np.radians(0.004), -12.0])
        R_NinE, dr_N, ecef = lla2base(lla, self.ecef_init, dtype=np.float64)

        np.testing.assert_allclose(ecef2base(self.ecef_init, ecef, R_NinE, dtype=np.float64),
                                   dr_N, atol=1e-9)

    def test_pos_ned2ecef_inverts_ecef2base(self):
        R_NinE = lla2R_NinE(self.origin_lla, dtype=np.float64)
        for r_N in [np.array([100.0, 200.0, -50.0]),
                    np.array([-1000.0, 0.0, 3.0]),
                    np.array([0.0, 0.0, 0.0])]:
            ecef = pos_ned2ecef(r_N, self.ecef_init, R_NinE)
            self.assertEqual(ecef.dtype, np.float64)

            r_N_recovered = ecef2base(self.ecef_init, ecef, R_NinE, dtype=np.float64)
            np.testing.assert_allclose(r_N_recovered, r_N, atol=1e-7)

    def test_pos_ned2ecef_down_moves_towards_center(self):
        R_NinE = lla2R_NinE(self.origin_lla, dtype=np.float64)
        ecef = pos_ned2ecef(np.array([0.0, 0.0, 10.0]), self.ecef_init, R_NinE)

        self.assertAlmostEqual(np.linalg.norm(self.ecef_init) - np.linalg.norm(ecef), 10.0, delta=0.05)

    def test_base_outputs_use_real_width(self):
        numeric_config.configure_from_dict({'real_dtype': 'float32'})
        lla = self.origin_lla + np.array([np.radians(0.001), 0.0, 0.0])
        R_NinE, dr_N, ecef = lla2base(lla, self.ecef_init)

        self.assertEqual(R_NinE.dtype, np.float32)
        self.assertEqual(dr_N.dtype, np.float32)
        self.assertEqual(ecef.dtype, np.float64)

        _, dr_N64, _ = lla2base(lla, self.ecef_init, dtype=np.float64)
        np.testing.assert_allclose(dr_N, dr_N64, atol=1e-3)


class TestVelocityRotation(unittest.TestCase):

    def setUp(self):
        self.lla = np.array([np.radians(45.5), np.radians(-73.6), 50.0])
        self.vel_ecef = np.array([12.3, -4.5, 7.8])

    def tearDown(self):
        numeric_config.reset()

    def test_matches_R_EinN(self):
        vel_ned = vel_ecef2ned(self.lla, self.vel_ecef, fast_math=False, dtype=np.float64)
        expected = lla2R_EinN(self.lla, dtype=np.float64) @ self.vel_ecef

        np.testing.assert_allclose(vel_ned, expected, atol=1e-12)

    def test_preserves_speed(self):
        vel_ned = vel_ecef2ned(self.lla, self.vel_ecef, dtype=np.float64)
        self.assertAlmostEqual(np.linalg.norm(vel_ned), np.linalg.norm(self.vel_ecef), places=10)

    def test_fast_math_backend(self):
        exact = vel_ecef2ned(self.lla, self.vel_ecef, fast_math=False, dtype=np.float64)
        fast = vel_ecef2ned(self.lla, self.vel_ecef, fast_math=True, dtype=np.float64)

        np.testing.assert_allclose(fast, exact, atol=1e-3)

    def test_fast_math_from_config(self):
        numeric_config.configure_from_dict({'fast_math': True, 'real_dtype': 'float32'})
        vel_ned = vel_ecef2ned(self.lla, self.vel_ecef)

        self.assertEqual(vel_ned.dtype, np.float32)
        np.testing.assert_allclose(vel_ned, lla2R_EinN(self.lla, dtype=np.float64) @ self.vel_ecef,
                                   atol=1e-3)


if __name__ == '__main__':
    unittest.main()
