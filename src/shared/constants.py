from enum import Enum

# --- Сетка точек (point cloud)
# Минимальное число узлов по одной оси (иначе интерполяция делит на ноль)
MIN_GRID_SIZE = 2

# Количество узлов сетки по каждой оси по умолчанию (grid x grid точек)
DEFAULT_GRID_SIZE = 100

# Минимальное число точек для триангуляции
MIN_TRIANGULATION_POINTS = 3

# Число вершин треугольника
TRIANGLE_VERTEX_COUNT = 3

# Размер окна по умолчанию (px)
DEFAULT_WINDOW_WIDTH = 1024
DEFAULT_WINDOW_HEIGHT = 1024

# Во сколько раз область выборки больше окна:
# повышает шанс, что изолинии замкнутся внутри видимой области
POINT_CLOUD_MARGIN_RATIO = 1.25


class NoiseKind(str, Enum):
    FBM = 'FBM'
    BILLOW = 'BILLOW'
    RIDGED = 'RIDGED'


# --- Шум / карта высот
# Документированный диапазон значений генератора шума
NOISE_MIN = -1.0
NOISE_MAX = 1.0

# Значения по умолчанию (совпадают с настройками Fbm из скетчей)
DEFAULT_NOISE_KIND = NoiseKind.FBM
DEFAULT_NOISE_SCALE = 800.0
DEFAULT_Z_SCALE = 350.0
DEFAULT_OCTAVES = 8
DEFAULT_FREQUENCY = 1.5
DEFAULT_LACUNARITY = 2.3
DEFAULT_PERSISTENCE = 0.33
DEFAULT_SEED = 4242.0

# Максимальное число октав (ограничение генератора)
MAX_OCTAVES = 32

# Ослабление веса для ridged multifractal
RIDGED_ATTENUATION = 2.0

# Диапазоны для случайной генерации параметров рельефа
RANDOM_SEED_RANGE = (1.0, 100000.0)
RANDOM_NOISE_SCALE_RANGE = (200.0, 1000.0)
RANDOM_OCTAVES_RANGE = (1, 20)
RANDOM_FREQUENCY_RANGE = (0.2, 3.2)
RANDOM_LACUNARITY_RANGE = (1.0, 10.0)
RANDOM_PERSISTENCE_RANGE = (0.1, 2.0)


# --- Изолинии
# Количество уровней изолиний по умолчанию
DEFAULT_N_CONTOURS = 70

# Границы уровней как доля z_scale (оба значения в [0.0, 1.0])
DEFAULT_MIN_CONTOUR = 0.01
DEFAULT_MAX_CONTOUR = 0.99


class TieBreak(str, Enum):
    """Как выбирать сегмент, если подходят несколько."""

    POOL_ORDER = 'POOL_ORDER'  # последний подходящий в порядке входа
    NEAREST = 'NEAREST'  # ближайший конец, при равенстве порядок входа


DEFAULT_TIE_BREAK = TieBreak.POOL_ORDER

# Допуск совпадения концов сегментов при сшивке (единицы координат).
# Зависит от плотности сетки: для 100x100 на окне 1024 px хватает 1.0
DEFAULT_STITCH_TOLERANCE = 1.0

# Допуск, при котором полилиния считается замкнутой для заливки полигонов
DEFAULT_CLOSURE_TOLERANCE = 20.0

# Минимальное количество точек для валидной полилинии
MIN_POINTS_FOR_POLYLINE = 2

# Число потоков для параллельной обработки уровней (1 = последовательно)
CONTOUR_PARALLEL_WORKERS = 1

# Логировать использование памяти после построения поверхности
LOG_MEMORY_AFTER_SURFACE = True

# Доступность psutil для диагностики памяти
PSUTIL_AVAILABLE = True


# --- Профили
PROFILES_DIR_ENV = 'MEANDER_PROFILES_DIR'
PROFILES_APP_DIR = '.meander'

# --- Логирование
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
