from .common import *

class flt:  # decodes a raw bit pattern of a binary interchange format
    def __init_subclass__(cls, flen, tlen, **kwargs):  # all masks follow from total and trailing significand width
        super().__init_subclass__(**kwargs)
        cls.FLEN      = flen
        cls.TLEN      = tlen  # number of trailing significand bits
        cls.SIGN_BIT  = 1 << flen-1
        cls.QUIET_BIT = 1 << tlen-1
        cls.ABS_MASK  = cls.SIGN_BIT-1
        cls.SIG_ONE   = 1 << tlen
        cls.TSIG_MASK = cls.SIG_ONE-1
        cls.EXP_MASK  = cls.ABS_MASK ^ cls.TSIG_MASK
        cls.EXP_BIAS  = (1<<flen-tlen-2)-1
        cls.QNAN      = cls.EXP_MASK|cls.QUIET_BIT
        cls.FMAX      = cls.ABS_MASK ^ (1<<tlen)

    def __init__(self, raw):
        self.raw = zext(self.FLEN, raw)
        self.is_neg = (self.raw&self.SIGN_BIT) != 0
        self.is_zero = (self.raw&self.ABS_MASK) == 0
        self.is_inf = self.raw&self.ABS_MASK == self.EXP_MASK
        self.is_nan = self.raw&self.ABS_MASK > self.EXP_MASK
        self.exp = (self.raw&self.EXP_MASK)>>self.TLEN  # biased exponent field
        self.m = self.raw&self.TSIG_MASK  # trailing significand field
        self.e = self.exp - self.EXP_BIAS
        self.is_subnormal = self.exp == 0 and not self.is_zero
        self.is_normal = not (self.is_subnormal or self.is_inf or self.is_nan or self.is_zero)
        self.s = self.m
        if self.is_subnormal: self.e -= self.TLEN-self.s.bit_length()  # reduce exp by number of leading zeros
        elif self.is_normal: self.s |= self.SIG_ONE  # + implicit 1. if not (nan or inf or zero or subnormal)

    @classmethod
    def normalized(cls, s_s, s_e, s_sign, rm=RM_RNE):
        """Packs significand s_s, whose leading bit has weight 2**s_e, into raw bits.

        Rounds with mode rm, overflows to infinity (or the largest finite value
        for directed modes pointing away from it), and underflows into
        subnormals or a signed zero.
        """
        if s_s == 0: return cls.SIGN_BIT*s_sign  # zeros
        if s_e <= -cls.EXP_BIAS:  # subnormal
            shift = (cls.TLEN+1)-s_s.bit_length()
            s_s, _ = shift_right_and_round(s_s, s_sign, -shift+(-s_e-cls.EXP_BIAS+1), rm)
            s_e = -cls.EXP_BIAS if s_s&cls.SIG_ONE == 0 else -cls.EXP_BIAS+1  # carry to the top? not subnormal anymore
        else:
            shift = (cls.TLEN+1)-s_s.bit_length()
            s_s, carry = shift_right_and_round(s_s, s_sign, -shift, rm)
            if carry: s_e += 1
        if s_e > cls.EXP_BIAS:  # overflow
            if (rm==RM_RDN or rm==RM_RTZ) and not s_sign: return cls.FMAX  # RDN,RTZ cannot generate +inf
            elif (rm==RM_RUP or rm==RM_RTZ) and s_sign: return cls.FMAX|cls.SIGN_BIT  # RUP,RTZ cannot generate -inf
            else: return cls.EXP_MASK | (cls.SIGN_BIT*s_sign)  # +/-inf
        return (s_e+cls.EXP_BIAS) << cls.TLEN | (s_s&cls.TSIG_MASK) | (cls.SIGN_BIT * s_sign)

    def __repr__(self) -> str: return ('- ' if self.is_neg else '+ ') + f's: {self.s:b} e: {self.e} raw: {hex(self.raw)}'

class f16(flt, flen=16, tlen=10): pass

class f32(flt, flen=32, tlen=23):
    def __init__(self, float_or_raw): super().__init__(float_or_raw if isinstance(float_or_raw, int) else f32_raw(float_or_raw))

SIZE              = f16.FLEN
MAX_EXPONENT      = f16.EXP_BIAS
MIN_EXPONENT      = 1-f16.EXP_BIAS
POSITIVE_ZERO     = 0
NEGATIVE_ZERO     = f16.SIGN_BIT
NaN               = f16.QNAN
POSITIVE_INFINITY = f16.EXP_MASK
NEGATIVE_INFINITY = f16.EXP_MASK|f16.SIGN_BIT
MAX_VALUE         = f16.FMAX  # 65504.0
MIN_VALUE         = 1  # smallest positive subnormal, 2**-24
MIN_NORMAL        = f16.SIG_ONE  # 2**-14
LOWEST_VALUE      = f16.FMAX|f16.SIGN_BIT  # -65504.0
EPSILON           = (f16.EXP_BIAS-f16.TLEN) << f16.TLEN  # 2**-10, distance between 1.0 and the next value
