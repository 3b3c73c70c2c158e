"""
Module: currency_kernel.domain.iso4217_data
Responsibility: The compiled-in ISO 4217 dataset.  One ``CodeEntry`` per
    active currency and fund code, ordered by numeric code.
Architecture position: Kernel > Domain.  Leaf module; imports nothing from
    the kernel except the ``CodeEntry`` record type.

Only the three major reserve currencies carry a display symbol.  Every other
entry leaves ``symbol`` empty.

``NumericCode`` names every numeric code by its alpha code, so callers can
write ``factory.from_numeric_code(NumericCode.RUB)`` instead of ``643``.
Members are ints and work anywhere a numeric code is accepted.
"""

from enum import IntEnum

from currency_kernel.domain.values import CodeEntry

ISO4217_ENTRIES: tuple[CodeEntry, ...] = (
    CodeEntry(8, "ALL", "Lek", 2),
    CodeEntry(12, "DZD", "Algerian Dinar", 2),
    CodeEntry(32, "ARS", "Argentine Peso", 2),
    CodeEntry(36, "AUD", "Australian Dollar", 2),
    CodeEntry(44, "BSD", "Bahamian Dollar", 2),
    CodeEntry(48, "BHD", "Bahraini Dinar", 3),
    CodeEntry(50, "BDT", "Taka", 2),
    CodeEntry(51, "AMD", "Armenian Dram", 2),
    CodeEntry(52, "BBD", "Barbados Dollar", 2),
    CodeEntry(60, "BMD", "Bermudian Dollar", 2),
    CodeEntry(64, "BTN", "Ngultrum", 2),
    CodeEntry(68, "BOB", "Boliviano", 2),
    CodeEntry(72, "BWP", "Pula", 2),
    CodeEntry(84, "BZD", "Belize Dollar", 2),
    CodeEntry(90, "SBD", "Solomon Islands Dollar", 2),
    CodeEntry(96, "BND", "Brunei Dollar", 2),
    CodeEntry(104, "MMK", "Kyat", 2),
    CodeEntry(108, "BIF", "Burundi Franc", 0),
    CodeEntry(116, "KHR", "Riel", 2),
    CodeEntry(124, "CAD", "Canadian Dollar", 2),
    CodeEntry(132, "CVE", "Cabo Verde Escudo", 2),
    CodeEntry(136, "KYD", "Cayman Islands Dollar", 2),
    CodeEntry(144, "LKR", "Sri Lanka Rupee", 2),
    CodeEntry(152, "CLP", "Chilean Peso", 0),
    CodeEntry(156, "CNY", "Yuan Renminbi", 2),
    CodeEntry(170, "COP", "Colombian Peso", 2),
    CodeEntry(174, "KMF", "Comorian Franc", 0),
    CodeEntry(188, "CRC", "Costa Rican Colon", 2),
    CodeEntry(191, "HRK", "Kuna", 2),
    CodeEntry(192, "CUP", "Cuban Peso", 2),
    CodeEntry(203, "CZK", "Czech Koruna", 2),
    CodeEntry(208, "DKK", "Danish Krone", 2),
    CodeEntry(214, "DOP", "Dominican Peso", 2),
    CodeEntry(222, "SVC", "El Salvador Colon", 2),
    CodeEntry(230, "ETB", "Ethiopian Birr", 2),
    CodeEntry(232, "ERN", "Nakfa", 2),
    CodeEntry(238, "FKP", "Falkland Islands Pound", 2),
    CodeEntry(242, "FJD", "Fiji Dollar", 2),
    CodeEntry(262, "DJF", "Djibouti Franc", 0),
    CodeEntry(270, "GMD", "Dalasi", 2),
    CodeEntry(292, "GIP", "Gibraltar Pound", 2),
    CodeEntry(320, "GTQ", "Quetzal", 2),
    CodeEntry(324, "GNF", "Guinean Franc", 0),
    CodeEntry(328, "GYD", "Guyana Dollar", 2),
    CodeEntry(332, "HTG", "Gourde", 2),
    CodeEntry(340, "HNL", "Lempira", 2),
    CodeEntry(344, "HKD", "Hong Kong Dollar", 2),
    CodeEntry(348, "HUF", "Forint", 2),
    CodeEntry(352, "ISK", "Iceland Krona", 0),
    CodeEntry(356, "INR", "Indian Rupee", 2),
    CodeEntry(360, "IDR", "Rupiah", 2),
    CodeEntry(364, "IRR", "Iranian Rial", 2),
    CodeEntry(368, "IQD", "Iraqi Dinar", 3),
    CodeEntry(376, "ILS", "New Israeli Sheqel", 2),
    CodeEntry(388, "JMD", "Jamaican Dollar", 2),
    CodeEntry(392, "JPY", "Yen", 0),
    CodeEntry(398, "KZT", "Tenge", 2),
    CodeEntry(400, "JOD", "Jordanian Dinar", 3),
    CodeEntry(404, "KES", "Kenyan Shilling", 2),
    CodeEntry(408, "KPW", "North Korean Won", 2),
    CodeEntry(410, "KRW", "Won", 0),
    CodeEntry(414, "KWD", "Kuwaiti Dinar", 3),
    CodeEntry(417, "KGS", "Som", 2),
    CodeEntry(418, "LAK", "Lao Kip", 2),
    CodeEntry(422, "LBP", "Lebanese Pound", 2),
    CodeEntry(426, "LSL", "Loti", 2),
    CodeEntry(430, "LRD", "Liberian Dollar", 2),
    CodeEntry(434, "LYD", "Libyan Dinar", 3),
    CodeEntry(446, "MOP", "Pataca", 2),
    CodeEntry(454, "MWK", "Malawi Kwacha", 2),
    CodeEntry(458, "MYR", "Malaysian Ringgit", 2),
    CodeEntry(462, "MVR", "Rufiyaa", 2),
    CodeEntry(480, "MUR", "Mauritius Rupee", 2),
    CodeEntry(484, "MXN", "Mexican Peso", 2),
    CodeEntry(496, "MNT", "Tugrik", 2),
    CodeEntry(498, "MDL", "Moldovan Leu", 2),
    CodeEntry(504, "MAD", "Moroccan Dirham", 2),
    CodeEntry(512, "OMR", "Rial Omani", 3),
    CodeEntry(516, "NAD", "Namibia Dollar", 2),
    CodeEntry(524, "NPR", "Nepalese Rupee", 2),
    CodeEntry(532, "ANG", "Netherlands Antillean Guilder", 2),
    CodeEntry(533, "AWG", "Aruban Florin", 2),
    CodeEntry(548, "VUV", "Vatu", 0),
    CodeEntry(554, "NZD", "New Zealand Dollar", 2),
    CodeEntry(558, "NIO", "Cordoba Oro", 2),
    CodeEntry(566, "NGN", "Naira", 2),
    CodeEntry(578, "NOK", "Norwegian Krone", 2),
    CodeEntry(586, "PKR", "Pakistan Rupee", 2),
    CodeEntry(590, "PAB", "Balboa", 2),
    CodeEntry(598, "PGK", "Kina", 2),
    CodeEntry(600, "PYG", "Guarani", 0),
    CodeEntry(604, "PEN", "Sol", 2),
    CodeEntry(608, "PHP", "Philippine Peso", 2),
    CodeEntry(634, "QAR", "Qatari Rial", 2),
    CodeEntry(643, "RUB", "Russian Ruble", 2),
    CodeEntry(646, "RWF", "Rwanda Franc", 0),
    CodeEntry(654, "SHP", "Saint Helena Pound", 2),
    CodeEntry(682, "SAR", "Saudi Riyal", 2),
    CodeEntry(690, "SCR", "Seychelles Rupee", 2),
    CodeEntry(694, "SLL", "Leone", 2),
    CodeEntry(702, "SGD", "Singapore Dollar", 2),
    CodeEntry(704, "VND", "Dong", 0),
    CodeEntry(706, "SOS", "Somali Shilling", 2),
    CodeEntry(710, "ZAR", "Rand", 2),
    CodeEntry(728, "SSP", "South Sudanese Pound", 2),
    CodeEntry(748, "SZL", "Lilangeni", 2),
    CodeEntry(752, "SEK", "Swedish Krona", 2),
    CodeEntry(756, "CHF", "Swiss Franc", 2),
    CodeEntry(760, "SYP", "Syrian Pound", 2),
    CodeEntry(764, "THB", "Baht", 2),
    CodeEntry(776, "TOP", "Pa’anga", 2),
    CodeEntry(780, "TTD", "Trinidad and Tobago Dollar", 2),
    CodeEntry(784, "AED", "UAE Dirham", 2),
    CodeEntry(788, "TND", "Tunisian Dinar", 3),
    CodeEntry(800, "UGX", "Uganda Shilling", 0),
    CodeEntry(807, "MKD", "Denar", 2),
    CodeEntry(818, "EGP", "Egyptian Pound", 2),
    CodeEntry(826, "GBP", "Pound Sterling", 2, "£"),
    CodeEntry(834, "TZS", "Tanzanian Shilling", 2),
    CodeEntry(840, "USD", "US Dollar", 2, "$"),
    CodeEntry(858, "UYU", "Peso Uruguayo", 2),
    CodeEntry(860, "UZS", "Uzbekistan Sum", 2),
    CodeEntry(882, "WST", "Tala", 2),
    CodeEntry(886, "YER", "Yemeni Rial", 2),
    CodeEntry(901, "TWD", "New Taiwan Dollar", 2),
    CodeEntry(927, "UYW", "Unidad Previsional", 4),
    CodeEntry(928, "VES", "Bolívar Soberano", 2),
    CodeEntry(929, "MRU", "Ouguiya", 2),
    CodeEntry(930, "STN", "Dobra", 2),
    CodeEntry(931, "CUC", "Peso Convertible", 2),
    CodeEntry(932, "ZWL", "Zimbabwe Dollar", 2),
    CodeEntry(933, "BYN", "Belarusian Ruble", 2),
    CodeEntry(934, "TMT", "Turkmenistan New Manat", 2),
    CodeEntry(936, "GHS", "Ghana Cedi", 2),
    CodeEntry(938, "SDG", "Sudanese Pound", 2),
    CodeEntry(940, "UYI", "Uruguay Peso en Unidades Indexadas (UI)", 0),
    CodeEntry(941, "RSD", "Serbian Dinar", 2),
    CodeEntry(943, "MZN", "Mozambique Metical", 2),
    CodeEntry(944, "AZN", "Azerbaijan Manat", 2),
    CodeEntry(946, "RON", "Romanian Leu", 2),
    CodeEntry(947, "CHE", "WIR Euro", 2),
    CodeEntry(948, "CHW", "WIR Franc", 2),
    CodeEntry(949, "TRY", "Turkish Lira", 2),
    CodeEntry(950, "XAF", "CFA Franc BEAC", 0),
    CodeEntry(951, "XCD", "East Caribbean Dollar", 2),
    CodeEntry(952, "XOF", "CFA Franc BCEAO", 0),
    CodeEntry(953, "XPF", "CFP Franc", 0),
    CodeEntry(955, "XBA", "Bond Markets Unit European Composite Unit (EURCO)", 0),
    CodeEntry(956, "XBB", "Bond Markets Unit European Monetary Unit (E.M.U.-6)", 0),
    CodeEntry(957, "XBC", "Bond Markets Unit European Unit of Account 9 (E.U.A.-9)", 0),
    CodeEntry(958, "XBD", "Bond Markets Unit European Unit of Account 17 (E.U.A.-17)", 0),
    CodeEntry(959, "XAU", "Gold", 0),
    CodeEntry(960, "XDR", "SDR (Special Drawing Right)", 0),
    CodeEntry(961, "XAG", "Silver", 0),
    CodeEntry(962, "XPT", "Platinum", 0),
    CodeEntry(963, "XTS", "Codes specifically reserved for testing purposes", 0),
    CodeEntry(964, "XPD", "Palladium", 0),
    CodeEntry(965, "XUA", "ADB Unit of Account", 0),
    CodeEntry(967, "ZMW", "Zambian Kwacha", 2),
    CodeEntry(968, "SRD", "Surinam Dollar", 2),
    CodeEntry(969, "MGA", "Malagasy Ariary", 2),
    CodeEntry(970, "COU", "Unidad de Valor Real", 2),
    CodeEntry(971, "AFN", "Afghani", 2),
    CodeEntry(972, "TJS", "Somoni", 2),
    CodeEntry(973, "AOA", "Kwanza", 2),
    CodeEntry(975, "BGN", "Bulgarian Lev", 2),
    CodeEntry(976, "CDF", "Congolese Franc", 2),
    CodeEntry(977, "BAM", "Convertible Mark", 2),
    CodeEntry(978, "EUR", "Euro", 2, "€"),
    CodeEntry(979, "MXV", "Mexican Unidad de Inversion (UDI)", 2),
    CodeEntry(980, "UAH", "Hryvnia", 2),
    CodeEntry(981, "GEL", "Lari", 2),
    CodeEntry(984, "BOV", "Mvdol", 2),
    CodeEntry(985, "PLN", "Zloty", 2),
    CodeEntry(986, "BRL", "Brazilian Real", 2),
    CodeEntry(990, "CLF", "Unidad de Fomento", 4),
    CodeEntry(994, "XSU", "Sucre", 0),
    CodeEntry(997, "USN", "US Dollar (Next day)", 2),
    CodeEntry(999, "XXX", "The codes assigned for transactions where no currency is involved", 0),
)

NumericCode = IntEnum(
    "NumericCode",
    [(entry.alpha_code, entry.numeric_code) for entry in ISO4217_ENTRIES],
    module=__name__,
)
